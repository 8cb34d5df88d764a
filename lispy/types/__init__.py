"""Value model and environment for Lispy."""
