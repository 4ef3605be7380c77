#file_handler.py
import os

from .coders import pack_bit_string, unpack_bit_string
from .settings import FILE_SIGNATURE, VERSION
from .validators import validate_file_exists, validate_type


def read_text_file(file_path: str) -> str:
    validate_type(file_path, "File path", str)
    validate_file_exists(file_path)
    with open(file_path, 'r', encoding='utf-8', newline='') as file:
        return file.read()


def write_text_file(file_path: str, text: str) -> None:
    validate_type(text, "Text", str)
    with open(file_path, 'w', encoding='utf-8', newline='') as file:
        file.write(text)


def get_file_size(file_path: str) -> int:
    validate_file_exists(file_path)
    return os.path.getsize(file_path)


class CompressedFile:
    """
    Stores a bit string packed into bytes.

    Layout: signature, version (2 bytes), bit length (8 bytes), packed bits.
    The code table is not stored, so the bits can only be decoded with the
    session that produced them.
    """

    def __init__(self):
        self.file_signature = FILE_SIGNATURE

    def write(self, file_path: str, bits: str) -> int:
        packed = pack_bit_string(bits)
        with open(file_path, 'wb') as file:
            file.write(self.file_signature)
            #write the version in 2 bytes
            file.write(VERSION.to_bytes(2, 'big'))
            file.write(len(bits).to_bytes(8, 'big'))
            file.write(packed)
        return len(packed)

    def read(self, file_path: str) -> str:
        validate_file_exists(file_path)
        with open(file_path, 'rb') as file:
            #check the signature
            if file.read(len(self.file_signature)) != self.file_signature:
                raise ValueError("Invalid file signature")
            file_version = int.from_bytes(file.read(2), 'big')
            if file_version != VERSION:
                raise ValueError("incompatible version")
            header = file.read(8)
            if len(header) != 8:
                raise ValueError("Compressed file is truncated")
            bit_length = int.from_bytes(header, 'big')
            data = file.read()
        return unpack_bit_string(data, bit_length)
