"""JSON API endpoints for the content directory."""
