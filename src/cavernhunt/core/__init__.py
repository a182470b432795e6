"""Core contracts shared by the strategies and the cavern simulation."""
