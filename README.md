# aegisbot

The core logic of a chat moderation bot. It splits command input into
tokens and writes the text of moderation log entries. It also works out how
long a timeout lasts and when it must be applied again, resizes per-channel
message caches and pages through help listings. It uses only the standard
library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `aegisbot.lexer`: `lex(text)` splits command input on whitespace and
  returns `Token` objects. It handles single and double quotes and backslash
  escapes. Each token records its character `position`, its `length` in UTF-8
  bytes, its index (`iteration`) and whether it was `quoted`.
- `aegisbot.formatting`: `humanize_duration(delta)` gives text such as
  `"3 days"` or `"2 months"`. `duration_phrase(delta)` gives `"for 3 days"`.
  Both return `"permanent"` for a zero duration. `truncate_reason(reason)` cuts
  a reason to 500 characters and adds `...`.
- `aegisbot.moderation`: `ActionType`, `ModerationAction` (a row of the
  actions table, with its reason trimmed), `ban_expiry`, and `describe_ban`,
  `describe_kick`, `describe_softban`, `describe_unban` and `describe_warn`
  for log descriptions.
- `aegisbot.muting`: `mute_expiry`, `timeout_until`, `mute_audit_reason`,
  `describe_mute` and `describe_unmute`.
- `aegisbot.tasks`: `TimeoutEntry`, `needs_reapply`, `reapply_until` and
  `plan_timeouts(entries, now)`. `plan_timeouts` picks the active mutes whose
  platform timeout must be set again and gives each a new end time, capped at
  27 days.
- `aegisbot.audit`: `describe_channel_action` and `describe_role_action`
  describe created, updated and deleted channels and roles. For updates they
  include field diffs built with `format_channel_changes`,
  `format_role_changes` and `field_diff`.
- `aegisbot.member_updates`: `nickname_change`, `role_changes`, `should_log`
  and `describe_member_update`.
- `aegisbot.message_events`: `describe_edit` returns an `EditLog`. When the
  content is longer than 500 bytes, the log carries a `msg.diff` or `new.txt`
  attachment instead of inline text. It also has `find_delete_actor`,
  `describe_delete` and `escape_code_fences`.
- `aegisbot.leaves`: `classify_leave` decides from recent `AuditRecord`s
  whether a member left, was kicked or was banned. `describe_leave` writes
  the log text.
- `aegisbot.cache_sizing`: `resize_channels(inserts, sizes)` grows or shrinks
  each channel's cache size by 20%, based on its recent traffic.
  `store_rows(sizes)` gives the rows to persist.
- `aegisbot.help`: `CommandInfo`, `permission_summary`, `syntax_block` and
  `command_detail` build the help text for one command. `HelpPages` builds the
  paged, per-category command listing; `press(button)` moves between pages and
  `buttons()` returns the paging buttons.
- `aegisbot.interactions`: `parse_custom_id` turns a button id into a
  `ComponentAction`. `reference_response` and `disable_encryption_response`
  give the replies.
- `aegisbot.startup`: `load_config(path)` reads a TOML file.
  `select_environment(config)` returns the `release` or `dev` `Environment`
  and raises `ValueError` on a bad configuration. It also has `cleanup`,
  which removes leftover `new_*aegis*` files, plus `update_ids_from`,
  `parse_update_ids`, `update_reply`, `extract_encryption_key` and
  `non_whitelisted`.

## Example

```python
from datetime import timedelta

from aegisbot.lexer import lex
from aegisbot.moderation import describe_ban

for token in lex('ban @user "spamming links" 7d'):
    print(token.iteration, token.position, token.raw, token.quoted)

print(describe_ban("abc123", 1, 2, timedelta(days=7), 0, "spamming links"))
```

## What this package does not do

The package only computes text, times and decisions. It does not connect to
a chat service, send messages or apply bans and timeouts. It does not store
anything in a database. It has no command that starts a bot. It does not
render the error reply for a command that failed to run. Those parts have to
be supplied by the application that uses it.