# product_inventory/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 3000))
PRODUCTS_FILE = os.getenv("PRODUCTS_FILE", "products.json")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
