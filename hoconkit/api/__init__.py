"""hoconkit API package - outer surfaces over the core."""
