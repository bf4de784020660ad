"""
Domain layer: entities, pure services and repository interfaces.
"""
