"""HTTP and console front ends for the solver."""
