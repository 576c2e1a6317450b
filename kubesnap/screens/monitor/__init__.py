"""Monitor screen package: configuration, presenter and screen."""
