"""RDF vocabulary used by the assembler.

The r2rml: namespace is the one declared by configuration graphs that ask
for a mapping assembly; ja: is the Jena assembler vocabulary, used here for
the built-in base graph types.
"""

from rdflib import Namespace

R2RML_PREFIX = "r2rml"
R2RML_URI = "http://r2rml#"
R2RML = Namespace(R2RML_URI)

JA_PREFIX = "ja"
JA_URI = "http://jena.hpl.hp.com/2005/11/Assembler#"
JA = Namespace(JA_URI)

# Type identifier the orchestrator is registered under
MODEL_TYPE = R2RML["Model"]

# Request properties
BASE_MODEL = R2RML["baseModel"]
MAPPING_FILE = R2RML["mappingFile"]
CONNECTION_URL = R2RML["connectionURL"]
USER = R2RML["user"]
PASSWORD = R2RML["password"]
COMPOSITION_MODE = R2RML["compositionMode"]

# Built-in base graph types
MEMORY_MODEL = JA["MemoryModel"]
DEFAULT_MODEL = JA["DefaultModel"]
EXTERNAL_CONTENT = JA["externalContent"]
