"""
Meme generator: caption an image with top/bottom text, preview it and
export it as a high-resolution PNG.
"""
