APP_TITLE = "PPM Viewer"
APP_SIZE = "816x639"

# obraz zastępczy, gdy nic nie wczytano
PLACEHOLDER_SIZE = (800, 600)

# górna granica width*height (ochrona przed ogromną alokacją)
MAX_PIXELS = 100_000_000

# ile bajtów początku pliku dołączamy do komunikatu błędu
SAMPLE_BYTES = 256

JPEG_QUALITY = 90

FILETYPES = [("PPM", "*.ppm;*.pnm"), ("Wszystkie pliki", "*.*")]
EXPORT_FILETYPES = [
    ("PNG", "*.png"),
    ("JPEG", "*.jpg;*.jpeg"),
    ("BMP", "*.bmp"),
    ("PPM", "*.ppm"),
]
