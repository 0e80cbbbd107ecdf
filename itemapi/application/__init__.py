"""
Application layer package.

Contains use cases that orchestrate domain logic.
Each use case is a single class with one public method that
returns a Result instead of raising for expected failures.
This layer depends on domain ports, never on infrastructure.
"""
