"""Contract-address extraction from deployment script output."""

import re

# "Contract address: 0x…" printed by the deploy script
_LABELLED_ADDRESS = re.compile(r"Contract address:\s*(0x[0-9a-fA-F]{40})(?![0-9a-fA-F])")
# {"contractAddress": "0x…"} printed as the script's JSON summary
_JSON_ADDRESS = re.compile(r'"contractAddress"\s*:\s*"(0x[0-9a-fA-F]{40})"')


def extract_contract_address(output: str) -> str | None:
    """Return the first contract address announced in ``output``, or None.

    Lines are scanned in order and either convention may match; only a
    complete 42-character ``0x`` address is accepted.
    """
    for line in output.splitlines():
        for pattern in (_LABELLED_ADDRESS, _JSON_ADDRESS):
            match = pattern.search(line)
            if match:
                return match.group(1)
    return None
