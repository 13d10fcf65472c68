"""Kernel – framework-free building blocks shared by every layer."""
