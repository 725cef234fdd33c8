#!/usr/bin/env python3
"""
Trace Knowledge Base

Search locally captured pages by title, content and summary.
"""

from trace_kb.cli.main import main

if __name__ == "__main__":
    main()
