"""Core CLI building blocks: constants, decorators and output."""
