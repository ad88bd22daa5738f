"""
Service layer.

``user_store`` owns every statement run against the database;
``user_filters`` turns lookup parameters into a parameterized
``WHERE`` clause.
"""
