# (c) Copyright IBM Corp. 2025

# Module version file.  Used by setup.py and the command line tool.
VERSION = "1.0.0"
