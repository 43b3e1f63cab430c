"""SVG sprite assembly and optimization."""
