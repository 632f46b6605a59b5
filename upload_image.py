#!/usr/bin/env python3
"""
Issue Image Uploader
Resizes an image, commits it to the image repository and prints the markdown
link for the current issue.
This is a compatibility wrapper that calls the function in image_publisher.utils.image_uploader
"""

import sys
from pathlib import Path

# Add project root to Python path
current_dir = Path(__file__).resolve().parent
sys.path.insert(0, str(current_dir))

from image_publisher.utils.image_uploader import main

if __name__ == "__main__":
    sys.exit(main())
