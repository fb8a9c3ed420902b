"""Resource lifecycle managers for the `manifest` and `token` kinds."""
