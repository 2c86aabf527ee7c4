"""Client settings and the environment they are read from."""
