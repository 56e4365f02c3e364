"""Interactive construction and management of execution-layer genesis specifications."""
