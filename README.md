# agentui

Building blocks for the terminal interface of a chat-driven coding agent:
a conversation layout, an input box with `@` file references, a file
autocomplete popup, a log panel, markdown rendering and mouse text selection.

The pieces keep their state in plain Python objects and draw with `rich`.
That lets you drive them from any event loop and test them without a terminal.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `agentui.layout` | `Rect`, `LayoutAreas` and `calculate_layout(size, show_debug)` place the title bar, conversation, optional debug panel, input box, input status line and status bar. |
| `agentui.selection` | `TextPosition`, `SelectionTarget` and `TextSelection`, plus `mouse_to_text_position`, `extract_selected_text` and `apply_selection_highlight` for selecting text with the mouse. |
| `agentui.status_bar` | `StatusBar` holds the session, the model, the tool count and whether a reply is streaming. |
| `agentui.input_status` | `InputStatus` and `InputStatusIndicator` show typing, sending and sent. Temporary states go back to idle on their own. |
| `agentui.permission_prompt` | `PermissionPrompt` and `PermissionResponse` ask the user before a tool runs. |
| `agentui.prompt` | `select_from_candidates` and `confirm` are plain line-based prompts on any pair of text streams. |
| `agentui.markdown` | `render_markdown(markdown, width)` turns markdown into styled terminal lines. |
| `agentui.completer` | `FileReferenceCompleter` and `Completion` complete `@file` references in a line of text. |
| `agentui.helper` | `FileReferenceHelper` combines completion with bracket-aware highlighting for line editors. |
| `agentui.debug_panel` | `DebugPanel`, `LogEntry` and `LevelFilter` provide a scrollable log view with a bounded size and a level filter. |
| `agentui.tui_selector` | `TuiFileSelector` is a full-screen file picker that filters as you type. |
| `agentui.autocomplete` | `FileAutocomplete` and `FileInfo` browse the directory tree for the `@` popup. |
| `agentui.input` | `InputWidget`, `TextArea`, `KeyEvent`, `InputMode` and `CursorMove` make up the multi-line input box with autocomplete. |

## Example

```python
from agentui.layout import Rect, calculate_layout
from agentui.markdown import render_markdown
from agentui.debug_panel import DebugPanel, LogEntry

areas = calculate_layout(Rect(0, 0, 120, 40), show_debug=True)
print(areas.conversation, areas.debug)

for line in render_markdown("# Title\n\nSome **text** and `code`.", 80):
    print(line)

panel = DebugPanel(100)
panel.cycle_level_filter()
print(panel.level_filter_name())  # DEBUG
```

### Input box

Key presses go to the input box as `KeyEvent` values. `handle_key_event`
returns `True` when the user presses Enter to send the message. Typing `@`
opens the file popup. While it is open, Up and Down browse the matches and
Enter picks a file or opens a directory.

```python
from agentui.input import InputWidget, KeyEvent

widget = InputWidget()
for ch in "hello":
    widget.handle_key_event(KeyEvent.char(ch))
if widget.handle_key_event(KeyEvent("enter")):
    print("send:", widget.text())
```