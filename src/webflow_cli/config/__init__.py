"""Client settings and on-disk profile configuration."""
