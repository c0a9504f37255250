"""minirb language server."""
