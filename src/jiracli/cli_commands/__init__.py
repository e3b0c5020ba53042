"""Command modules. Each exposes ``register(cli)``."""
