"""Human and machine rendering of ServiceResult for the CLI."""
