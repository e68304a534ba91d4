"""
Public property keys.

Build tool integrations pass these as system properties
(``-Dretrolambda.inputDir=...``); the names are part of the external
contract and must not change.
"""

PREFIX = "retrolambda."

BYTECODE_VERSION = PREFIX + "bytecodeVersion"
DEFAULT_METHODS = PREFIX + "defaultMethods"
INPUT_DIR = PREFIX + "inputDir"
OUTPUT_DIR = PREFIX + "outputDir"
CLASSPATH = PREFIX + "classpath"
CLASSPATH_FILE = PREFIX + "classpathFile"
INCLUDED_FILES = PREFIX + "includedFiles"
INCLUDED_FILES_FILE = PREFIX + "includedFilesFile"
JAVAC_HACKS = PREFIX + "javacHacks"
QUIET = PREFIX + "quiet"

# Class file major version of Java 7
JAVA_7_BYTECODE_VERSION = 51
