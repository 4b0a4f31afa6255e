"""create-fullstack-app: scaffold a client/server TypeScript project."""

__version__ = "1.0.0"
