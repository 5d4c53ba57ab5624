"""HTTP API for qurantree."""
