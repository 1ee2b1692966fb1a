"""Interruptible Hamiltonian-cycle backtracking search for teaching visualizations."""
__version__ = "0.1.0"
