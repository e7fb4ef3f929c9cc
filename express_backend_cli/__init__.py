"""express-backend-cli -- interactive generator for Node.js Express API projects."""

__version__ = "1.0.0"
