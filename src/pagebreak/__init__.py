"""Framework agnostic website pagination."""
