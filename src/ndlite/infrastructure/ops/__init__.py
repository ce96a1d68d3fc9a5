"""CPU kernels operating on raw ``float64`` NumPy buffers."""
