"""Core building blocks: configuration, menu model, selector and executor."""
