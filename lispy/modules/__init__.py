"""Loading of Lispy source bundled with or configured for the interpreter."""
