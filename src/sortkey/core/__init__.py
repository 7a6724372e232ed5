"""sortkey core: key sets, configuration, errors and types."""
