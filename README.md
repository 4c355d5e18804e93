# quizline

The logic behind interactive terminal prompts. `quizline` edits a line of text with a
grapheme-aware cursor, turns key presses into actions, parses and formats answers, runs
validators and records the error message to show the user. Reading keys and drawing the prompt
are left to the caller, so the same prompt state can be driven by a real terminal or by a
scripted list of keys in tests.

## Installation

```
pip install quizline
```

## Editing a line of text

`quizline.input.Input` holds the text and a cursor counted in grapheme clusters, so an emoji
with a variation selector or a CJK character moves and deletes as one unit.

```python
from quizline.input import Input, InputAction, InputActionKind, Magnitude, LineDirection

line = Input("great idea! you are a genius").with_cursor(15)
result = line.handle(
    InputAction(InputActionKind.DELETE, Magnitude.WORD, LineDirection.LEFT)
)
print(line.content)         # "great idea!  are a genius"
print(line.pre_cursor)      # "great idea! "
print(result.needs_redraw())  # True
```

`handle` returns an `InputActionResult`: `CONTENT_CHANGED`, `POSITION_CHANGED` or `CLEAN`
when nothing happened (for example moving left at the start of the line). `with_cursor` raises
`ValueError` for a cursor past the end of the content; `clear()` empties the content but keeps
the placeholder.

## Keys and actions

`quizline.keys.Key` describes a key press; `Key.char(c, modifiers)` builds a character key and
`char_keys_from_str(text)` gives one key per character.

`quizline.input.input_action_from_key` maps keys to edits: Backspace and Delete delete a
character (a word with Ctrl+Delete), Home and End jump to the ends of the line, Left and Right
move by character (by word with Ctrl), and character keys write. Ctrl+H is ignored.

`quizline.actions.action_from_key(key, inner_from_key)` recognises the prompt-wide keys first:
Enter, `\n` and Ctrl+J submit; Escape, Ctrl+G and Ctrl+D cancel; Ctrl+C interrupts. Any other
key is passed to `inner_from_key`, and a non-`None` result becomes an `ActionKind.INNER` action.

## Prompts for any type

`quizline.custom_type.CustomType` is an immutable configuration; each `with_*` method returns a
new one. `start()` creates a `CustomTypePrompt` that holds the text input and the current error.

```python
from quizline.custom_type import CustomType
from quizline.parser import parse_type

amount = (
    CustomType("How much do you want to donate?", parser=parse_type(float))
    .with_formatter(lambda value: f"${value:.2f}")
    .with_error_message("Please type a valid number")
    .with_validator(lambda value: None if value > 0 else "You must donate a positive amount")
)
```

A parser returns the value or raises `ValueError`. A validator returns `None` for a valid value
or an error message; validators run in order and the first message wins. If a validator raises,
`submit()` raises `quizline.errors.CustomUserError`. When the input is empty and a default is
set, the default is the answer.

`submit()` returns the answer, or `None` after storing the message in `prompt.error`.
`format_answer(answer)` gives the text to show for the final answer and `default_message()` the
text for the default value, if any.

A minimal loop that drives a prompt from keys:

```python
from quizline.actions import ActionKind, action_from_key
from quizline.custom_type import custom_type_action_from_key
from quizline.errors import OperationCanceledError, OperationInterruptedError


def run(prompt, keys):
    for key in keys:
        action = action_from_key(key, custom_type_action_from_key)
        if action is None:
            continue
        if action.kind is ActionKind.SUBMIT:
            answer = prompt.submit()
            if answer is not None:
                return answer
        elif action.kind is ActionKind.CANCEL:
            raise OperationCanceledError()
        elif action.kind is ActionKind.INTERRUPT:
            raise OperationInterruptedError()
        else:
            prompt.handle(action.inner)
    raise OperationCanceledError()
```

## Confirmation prompts

`quizline.confirm.Confirm` asks a yes/no question. By default it accepts `y`, `yes`, `n` and
`no` in any case, shows the answer as `Yes` or `No`, and shows a default of `True` as `Y/n` and
`False` as `y/N`. Unparseable input sets the error to `Confirm.DEFAULT_ERROR_MESSAGE` unless
`with_error_message` replaced it. Confirm takes no validators.

```python
from quizline.confirm import Confirm
from quizline.keys import Key, KeyCode, char_keys_from_str

prompt = Confirm("Do you live in Brazil?").with_default(False).start()
prompt.default_message()  # "y/N"

answer = run(prompt, char_keys_from_str("yes") + [Key(KeyCode.ENTER)])  # True
prompt.format_answer(answer)  # "Yes"
```

`to_custom_type()` returns the equivalent `CustomType[bool]` configuration.

## Other helpers

- `quizline.parser`: `default_bool_parser` and `parse_type(target)`, which wraps a conversion
  such as `float` so that any failure raises `ValueError`.
- `quizline.formatter`: `default_string_formatter`, `default_bool_formatter` and
  `default_date_formatter` (`July 25, 2021`).
- `quizline.date_utils`: `Month`, `get_current_date`, `get_start_date(month, year)` and
  `get_month(n)`, which raises `ValueError` outside 1 to 12.
- `quizline.list_option.ListOption`: an option value together with its index in the full list.
- `quizline.ansi`: `strip_ansi`, `ansi_stripped_chars` and `ansi_aware_chars`, which yields
  characters and whole `AnsiEscapeSequence` items.
- `quizline.autocompletion`: the `Autocomplete` base class, `NoAutoCompletion` and
  `FunctionAutocomplete`, which wraps a function returning suggestions and completes to the
  highlighted suggestion.
- `quizline.errors`: `InquireError` and its subclasses `NotTTYError`,
  `InvalidConfigurationError`, `InquireIOError`, `OperationCanceledError`,
  `OperationInterruptedError` and `CustomUserError`; `from_os_error` turns an `OSError` into
  `NotTTYError` (for `ENOTTY`/`ENXIO`) or `InquireIOError`.

## What it does not do

`quizline` does not open or read from a terminal, switch it into raw mode, or draw anything on
screen; there is no styling or colour configuration and no command-line program. The only
complete prompts are `CustomType` and `Confirm`: there are no list selection, multi-selection,
password, editor or calendar prompts. `ListOption`, the date helpers and the autocompleters are
provided for building such prompts yourself.