"""Name resolution and font map construction."""
