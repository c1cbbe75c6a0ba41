#!/usr/bin/env python
"""
╔══════════════════════════════════════════════════════════════════════════════╗
║                           MINI-DES LIVE DEMO                                 ║
╚══════════════════════════════════════════════════════════════════════════════╝

Walks through the mini-DES cipher step by step:
- Key schedule
- Expansion and S-boxes inside the f-box
- A traced four-round encryption
- Breaking a ciphertext by trying all 512 keys
- Known-plaintext key recovery
- The audit log of everything above

Run with --no-pause to skip the ENTER prompts.
"""

import sys

from .core_crypto.bit_codec import format_bits
from .core_crypto.key_schedule import KeySchedule
from .core_crypto.round_function import expand, f
from .core_crypto.sboxes import s1_box, s2_box
from .core_crypto.feistel import MiniDES
from .attack.key_search import exhaustive_search, format_row, COLUMN_HEADER
from .attack.known_plaintext import recover_keys, recover_keys_multi
from .integration.event_logger import EventLogger


DEMO_KEY = 0b101010101
DEMO_PLAINTEXT = 0b101010101010


def print_header(title):
    """Print a formatted section header"""
    print("\n" + "═" * 70)
    print(f"  {title}")
    print("═" * 70)


def print_step(step_num, description):
    """Print a numbered step"""
    print(f"\n  [{step_num}] {description}")


def main(interactive=True):

    def pause(message="Press ENTER to continue..."):
        if interactive:
            print(f"\n  [PAUSE] {message}")
            input()

    logger = EventLogger()

    print("\n")
    print("╔" + "═" * 68 + "╗")
    print("║" + "MINI-DES: A 12-BIT FEISTEL CIPHER AND HOW TO BREAK IT".center(68) + "║")
    print("╚" + "═" * 68 + "╝")

    pause("Press ENTER to begin the demonstration...")

    print_header("PART 1: KEY SCHEDULE")

    schedule = KeySchedule(DEMO_KEY)
    print(f"\n  Master key: {format_bits(DEMO_KEY, 9)} ({DEMO_KEY})")
    for round_num in range(1, len(schedule) + 1):
        subkey = schedule.get_subkey(round_num)
        print(f"  K{round_num} = {format_bits(subkey, 8)} ({subkey})")
    print("\n  K2 is just the low byte of the key.")

    pause()

    print_header("PART 2: INSIDE THE F-BOX")

    r = 0b101100
    subkey = schedule.get_subkey(1)
    expanded = expand(r)
    mixed = expanded ^ subkey

    print_step("2.1", "Expansion")
    print(f"  R         = {format_bits(r, 6)}")
    print(f"  E(R)      = {format_bits(expanded, 8)}")

    print_step("2.2", "Key mixing")
    print(f"  E(R) ^ K1 = {format_bits(mixed, 8)}")

    print_step("2.3", "S-boxes")
    print(f"  S1({format_bits(mixed >> 4, 4)}) = {format_bits(s1_box(mixed >> 4), 3)}")
    print(f"  S2({format_bits(mixed & 0xF, 4)}) = {format_bits(s2_box(mixed & 0xF), 3)}")
    print(f"  f(R, K1)  = {format_bits(f(r, subkey), 6)}")

    pause()

    print_header("PART 3: FOUR FEISTEL ROUNDS")

    cipher = MiniDES(DEMO_KEY)
    print(f"\n  Plaintext: {format_bits(DEMO_PLAINTEXT, 12)} ({DEMO_PLAINTEXT})")
    for state in cipher.trace(DEMO_PLAINTEXT):
        print(f"  {state}")

    ciphertext = cipher.encrypt(DEMO_PLAINTEXT)
    print(f"\n  Ciphertext: {format_bits(ciphertext, 12)} ({ciphertext})")
    print(f"  Decrypted:  {format_bits(cipher.decrypt(ciphertext), 12)}")

    pause()

    print_header("PART 4: TRYING ALL 512 KEYS")

    records = exhaustive_search(ciphertext, logger=logger)
    print(f"\n  {COLUMN_HEADER}")
    for record in records[:4]:
        print(f"  {format_row(record)}")
    print("  ...")
    print(f"  {format_row(records[DEMO_KEY])}   <- the real key")
    print("  ...")

    hits = [rec.key for rec in records if rec.plaintext == DEMO_PLAINTEXT]
    print(f"\n  {len(records)} decryptions; keys giving the original plaintext: {hits}")

    pause()

    print_header("PART 5: KNOWN-PLAINTEXT ATTACK")

    candidates = recover_keys(DEMO_PLAINTEXT, ciphertext, logger=logger)
    print(f"\n  One known pair leaves {len(candidates)} candidate key(s): {candidates}")

    second_plain = 0b000011110000
    second_pair = (second_plain, cipher.encrypt(second_plain))
    candidates = recover_keys_multi([(DEMO_PLAINTEXT, ciphertext), second_pair], logger=logger)
    print(f"  Two known pairs leave {len(candidates)}: {candidates}")

    pause()

    print_header("PART 6: AUDIT LOG")

    logger.print_audit_log()
    print(f"\n  Chain Integrity Check: {'[OK] VALID' if logger.verify_integrity() else '[X] TAMPERED'}")

    print("\n\n" + "═" * 70)
    print("  DEMONSTRATION COMPLETE!")
    print("═" * 70)


def run():
    """Console-script entry point."""
    main(interactive="--no-pause" not in sys.argv[1:])


if __name__ == "__main__":
    run()
