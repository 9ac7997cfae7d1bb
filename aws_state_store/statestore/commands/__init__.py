"""Click commands for statestore."""
