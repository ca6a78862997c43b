"""Version detection, storage, aliasing and activation."""
