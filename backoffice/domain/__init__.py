"""
Domain layer: entities, events and the repository/store ports.
"""
