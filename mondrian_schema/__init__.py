"""
mondrian-schema: Build Mondrian OLAP schemas in Python and render them to XML.

Architecture:
    YAML / Python → Builder API (domain) → Schema → Adapter → schema.xml

Layers:
    - domain/: Schema entities (cubes, dimensions, hierarchies, levels, measures)
    - ingestion/: YAML loading and domain object construction
    - adapters/: Output-specific rendering (Mondrian XML)

Key Concepts:
    - Entities are append-only trees; every container keeps insertion order
    - Domain knows what it IS, adapters know how to RENDER it
    - Rendering is one-way: there is no XML → Schema parser
"""

__version__ = "0.1.0"
