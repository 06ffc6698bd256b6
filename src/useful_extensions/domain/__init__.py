"""
Domain Layer

Core rules of the library: exceptions, compiled patterns and configuration.
Has no dependencies on the Application or Shared layers.
"""
