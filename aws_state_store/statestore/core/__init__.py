"""Store, codec, client and table operations."""
