"""Click commands exposed by the column-mapper CLI."""
