"""Configuration settings for fb2wd."""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = Path(os.getenv("FB2WD_DATA_DIR", PROJECT_ROOT / "data"))

# Mapping tables (legacy local id -> successor local id)
ENTITY_MAPPINGS_PATH = Path(os.getenv("FB2WD_ENTITY_MAPPINGS", DATA_DIR / "entity-mappings.json"))
PROPERTY_MAPPINGS_PATH = Path(os.getenv("FB2WD_PROPERTY_MAPPINGS", DATA_DIR / "property-mappings.json"))

# Reports of legacy ids with no mapping entry
MISSING_ENTITY_MAPPINGS_PATH = DATA_DIR / "missing-entity-mappings.tsv"
MISSING_PROPERTY_MAPPINGS_PATH = DATA_DIR / "missing-property-mappings.tsv"

LOG_LEVEL = os.getenv("FB2WD_LOG_LEVEL", "WARNING")

# Freebase (legacy graph)
FB_ENTITY_PREFIX = "http://rdf.freebase.com/ns/m."
FB_PROPERTY_PREFIX = "http://rdf.freebase.com/ns/"

# Wikidata (successor graph)
ENTITY_PREFIX = "http://www.wikidata.org/entity/"
PROPERTY_PREFIX = "http://www.wikidata.org/prop/direct/"

# WebQuestions SPARQL uses xsd datatypes without declaring the prefix
XSD_PREFIX_DECL = "PREFIX xsd: <http://www.w3.org/2001/XMLSchema#>\n"


def ensure_dirs():
    """Ensure all required directories exist."""
    DATA_DIR.mkdir(parents=True, exist_ok=True)
