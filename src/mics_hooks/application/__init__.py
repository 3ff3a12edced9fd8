"""Application layer – signers, event decoding and the hook dispatcher."""
