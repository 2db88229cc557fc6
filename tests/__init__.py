"""
Test suite for docstore

- Unit tests for models, search predicates, and settings
- Behavioral tests for DocumentStore save / find_by_id / search
"""
