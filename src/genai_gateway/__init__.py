"""
GenAI gateway package.

Provides:
- Request normalization of prompts and media uploads into generation parts
- Response text extraction from Gemini generateContent payloads
- FastAPI HTTP surface plus a uvicorn launcher
"""
