"""Operation-group mixins composed into `NDArray`."""
