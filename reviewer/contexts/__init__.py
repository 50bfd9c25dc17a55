"""Bounded contexts of the resume reviewer."""
