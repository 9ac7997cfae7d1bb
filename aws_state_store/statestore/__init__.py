"""DynamoDB-backed state store."""
