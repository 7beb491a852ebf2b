"""Service layer between the HTTP routes and the storage / recognition collaborators."""
