"""
Application Layer

Option models, enums and ports (interfaces for external collaborators).
"""
