"""Core domain package for inkcap.

Core contains counting, limit enforcement, and feedback logic without any
terminal UI or file-handling code, keeping the business logic portable.
"""
