"""Convert Freebase SPARQL queries into Wikidata SPARQL queries."""
