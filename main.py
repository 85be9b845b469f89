"""Entry point for Image Transformer.

Usage:
  streamlit run main.py
"""

from imgx.app import main

main()
