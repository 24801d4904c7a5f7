"""Use cases — application operations over the domain ports."""
