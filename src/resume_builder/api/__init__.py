"""HTTP API for the resume builder."""
