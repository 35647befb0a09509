import base64
import binascii
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.types import PrivateKeyTypes
from claims_query_catalog.custom_exceptions.data_source_exceptions import (
    DataSourcePrivateKeyException,
)
from claims_query_catalog.logger import logger


def encode_string(value: str) -> str:
    """
    Encodes a string to its Base64 representation.

    Params:
        value (str): The string to encode.

    Returns:
        str: The base64 representation of the input string.
    """
    return base64.b64encode(value.encode()).decode()


def decode_string(value: str) -> str:
    """
    Decodes a Base64 encoded secret from the environment.

    Params:
        value (str): The Base64 encoded string to decode.

    Returns:
        str: The original string representation.

    Raises:
        ValueError: If the value is not valid Base64 text.
    """
    try:
        return base64.b64decode(value.encode(), validate=True).decode()
    except (binascii.Error, UnicodeDecodeError) as e:
        raise ValueError(f"Value is not a Base64 encoded string: {e}") from e


def load_private_key(private_key_file: str, private_key_password: str) -> bytes:
    """
    Reads a PEM private key and returns it as unencrypted PKCS8 DER bytes,
    the form Snowflake expects for key pair authentication.

    Params:
        private_key_file (str): Path to the PEM private key file.
        private_key_password (str): Password protecting the key.

    Returns:
        bytes: The decrypted private key in DER format.

    Raises:
        DataSourcePrivateKeyException: If the file cannot be read or the key cannot be decrypted.
    """
    try:
        with open(private_key_file, "rb") as key_file:
            pem_data = key_file.read()
    except FileNotFoundError:
        logger.error(f"Private key file not found: {private_key_file}")
        raise DataSourcePrivateKeyException(
            f"Private key file not found: {private_key_file}"
        )
    except OSError as e:
        logger.error(f"Error reading private key file: {e}")
        raise DataSourcePrivateKeyException(f"Error reading private key file: {e}")

    try:
        private_key: PrivateKeyTypes = serialization.load_pem_private_key(
            data=pem_data,
            password=private_key_password.encode(),
        )
        return private_key.private_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
    except (ValueError, TypeError) as e:
        logger.error(f"Error loading private key: {e}")
        raise DataSourcePrivateKeyException(f"Error loading private key: {e}")
