# neobind/verify.py


class AlwaysAcceptVerifier:
    """
    Signature check policy that accepts every binding.

    Nothing is verified: any sign text is treated as proof of ownership of the
    Neo address. Not safe for a real deployment; pass a verifier with the same
    verify() signature to create_app() to replace it.
    """

    def verify(self, neo_address: str, eth_address: str, sign_text: str) -> bool:
        return True
