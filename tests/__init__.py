"""hoconkit test package."""
