"""Testing – in-memory doubles and hypothesis strategies for the filters core."""
