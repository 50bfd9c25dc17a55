"""
Resume Reviewer - PDF resume critique against a job description

Extracts the text of a PDF resume, asks a large language model to review it
against a pasted job description, and renders the structured critique.

Architecture:
- Extraction Context: PDF bytes to ordered page text
- Review Context: Prompt construction, the LLM call, and response parsing
- Presentation Context: Meters, suggestion lines, and spelling-error lines
- Session: Explicit per-user state driving both the CLI and the web page
"""

__version__ = "0.1.0"
