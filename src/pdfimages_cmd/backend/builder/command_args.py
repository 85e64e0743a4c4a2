"""Common ``pdfimages`` command arguments."""

CONFIG_FLAG: tuple[str, ...] = ("-cfg",)  #: Read this config file instead of ~/.xpdfrc.
FIRST_PAGE: tuple[str, ...] = ("-f",)  #: First page to scan.
LAST_PAGE: tuple[str, ...] = ("-l",)  #: Last page to scan.
DCT_AS_JPEG: tuple[str, ...] = ("-j",)  #: Save DCT-encoded images as JPEG files.
RAW: tuple[str, ...] = ("-raw",)  #: Write images in their PDF-native formats.
OWNER_PASSWORD: tuple[str, ...] = ("-opw",)  #: Owner password, bypasses security restrictions.
USER_PASSWORD: tuple[str, ...] = ("-upw",)  #: User password.

INPUT_PLACEHOLDER = "<inpath>"
OUTPUT_PLACEHOLDER = "<outdir>"
