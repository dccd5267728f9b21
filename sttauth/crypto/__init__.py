"""Big integers, DER key decoding, RS256 signing and JWT assertions."""
