"""Protocol definitions for sortkey collaborators."""
