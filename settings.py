# Defaults for the do_dump_tags command.  Override any of these in a
# settings_local.py next to this file.

# Decode frames that use the UTF-16 text encodings (indicators 1 and 2).
# When False, their raw payload is shown, encoding byte included.
ID3_DECODE_UTF16 = False

# Treat unknown frame ids, unknown text encodings and frames that run
# past the end of the ID3 block as errors instead of skipping over them.
ID3_STRICT_CONTENT = False

# Passed to logging.basicConfig.
LOG_LEVEL = "WARNING"
