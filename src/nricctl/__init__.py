"""nricctl: NRIC/FIN identifier validation and check-digit tooling."""

__version__ = "0.1.0"
