"""Infrastructure layer for rustman.

Filesystem access behind Result-returning readers:

- storage.manifest: Cargo.toml parsing
- storage.scanner: project discovery in the scan directory
"""
