import sys
import base64
from dataclasses import dataclass

from azure.keyvault.secrets import SecretClient
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.serialization import pkcs12


@dataclass(frozen=True)
class AppCertificate:
    private_key_pem: bytes
    public_certificate_pem: bytes
    thumbprint: str

    def client_credential(self) -> dict:
        """Shape expected by msal.ConfidentialClientApplication(client_credential=...)."""
        return {
            "private_key": self.private_key_pem.decode("ascii"),
            "thumbprint": self.thumbprint,
            "public_certificate": self.public_certificate_pem.decode("ascii"),
        }


def key_vault_url(vault_name: str) -> str:
    return f"https://{vault_name}.vault.azure.net"


def get_secret(vault_name: str, secret_name: str, credential) -> str:
    url = key_vault_url(vault_name)
    print(f"[keyvault] GET secret '{secret_name}' from {url}", file=sys.stderr)
    with SecretClient(vault_url=url, credential=credential) as client:
        return client.get_secret(secret_name).value


def load_certificate(b64_value: str) -> AppCertificate:
    raw = base64.b64decode(b64_value, validate=True)
    key, cert, _ = pkcs12.load_key_and_certificates(raw, None)
    if key is None or cert is None:
        raise ValueError("PKCS#12 payload must contain both a private key and a certificate")

    return AppCertificate(
        private_key_pem=key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        ),
        public_certificate_pem=cert.public_bytes(serialization.Encoding.PEM),
        thumbprint=cert.fingerprint(hashes.SHA1()).hex().upper(),
    )


def get_app_only_certificate(vault_name: str, certificate_name: str, credential) -> AppCertificate:
    certificate = load_certificate(get_secret(vault_name, certificate_name, credential))
    print(f"[keyvault] certificate loaded, thumbprint={certificate.thumbprint}", file=sys.stderr)
    return certificate
