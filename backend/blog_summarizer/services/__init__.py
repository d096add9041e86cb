"""Services package - summarize pipeline, translation and persistence."""
