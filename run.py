"""
Run script for the Shorts Forge server

Usage:
    python run.py
    
Or with uvicorn directly:
    python -m uvicorn shorts_forge.main:app --reload --host 0.0.0.0 --port 8000
"""
import os
import sys

# Add the project directory to the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

if __name__ == "__main__":
    import uvicorn
    from shorts_forge.core.config import settings
    
    uvicorn.run(
        "shorts_forge.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
