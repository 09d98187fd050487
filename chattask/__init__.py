"""chattask - chat and task services with role-based access control."""
