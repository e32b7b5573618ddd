"""Output — rendering validation results for humans and machines."""
