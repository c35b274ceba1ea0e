# spcompiler

Building blocks for a small teaching compiler:

- `spcompiler.syntax_tree` – syntax tree node dataclasses: `Number`,
  `Identifier`, `Assign`, `Print`, `If`, `Block`, `Operation`, `Program` and
  `Statements`, all derived from `Node`.
- `spcompiler.icg` – three-address intermediate code: `Instruction` and
  `InstructionType`, helper constructors (`assign_instruction`,
  `binop_instruction`, `print_instruction`, `return_instruction`,
  `if_false_goto_instruction`, `goto_instruction`, `label_instruction`,
  `function_instruction`, `endfunction_instruction`, `comment_instruction`)
  and the `IntermediateCode` list with temporaries, labels, constant folding
  and text output.
- `spcompiler.symbol_table` – `SymbolTable`, a hashed table of `Symbol`
  entries typed by `SymbolType` (`VAR`, `FUNC`, `CLASS_SYM`).
- `spcompiler.vm` – `VirtualMachine`, which runs intermediate code line by
  line, and the `spvm` command.

## Installing

```
pip install .
```

## Producing intermediate code

```python
import sys
from spcompiler.icg import IntermediateCode, binop_instruction, print_instruction

code = IntermediateCode()
temp = code.new_temp()                  # "t0"
code.add(binop_instruction(temp, "2", "+", "3"))
code.add(print_instruction(temp))
code.optimize()                         # "t0 = 2 + 3" becomes "t0 = 5"
code.write(sys.stdout)
```

`new_temp()` hands out `t0`, `t1`, … and `new_label()` hands out `L0`, `L1`, ….
`optimize()` replaces every binary operation whose two operands are integer
literals with an assignment of the result. It folds `+`, `-`, `*` and `/`
(division truncates toward zero, and division by zero folds to `0`); any other
operator folds to `0`. `Instruction.render()` gives the text of one line,
for example `ifFalse t1 goto L0` or `function main:`.
`comment_instruction(fmt, *args)` formats with `%` and keeps at most 255
characters.

## Keeping symbols

```python
from spcompiler.symbol_table import SymbolTable, SymbolType

table = SymbolTable()
table.insert("x", SymbolType.VAR)       # True
table.insert("x", SymbolType.FUNC)      # False: already present
"x" in table                            # True
table.lookup("x")                       # Symbol(name='x', type=SymbolType.VAR)
print(table.format())
```

`format()` returns a `Symbol Table:` heading followed by one
`  name : TYPE` line per symbol, in bucket order; `dump(file)` writes the same
text to a file, or to standard output when no file is given.

## Running intermediate code

Given a file such as `output.icg`:

```
x = 2 + 3
y = x * 4
print y
print "done"
```

run it with

```
spvm output.icg
```

which prints `20` and `done`.

- `NAME = EXPR` evaluates an integer expression with `+ - * / %`,
  parentheses, unary minus, literals and variables (unknown variables read as
  `0`; at most 100 variables are kept). Division and modulo truncate toward
  zero.
- `print ARG` prints a quoted string without its quotes, the value of an
  expression, a number, or a variable.
- Lines between `function ...` and `endfunction` are skipped.
- `call NAME` prints `Function call: NAME`.
- Any other non-empty line prints `Unknown instruction: ...`.

Errors in expressions (a missing closing parenthesis, division or modulo by
zero, unexpected characters) stop the run with an `Error: ...` message and
exit status 1; so does a file that cannot be opened.

The machine can also be driven from Python, where errors raise `VMError`:

```python
import io
from spcompiler.vm import VirtualMachine

out = io.StringIO()
vm = VirtualMachine(out)
vm.run(["a = 7 % 3", "print a"])
out.getvalue()                          # "1\n"
vm.variables                            # {"a": 1}
```

## What this package does not do

There is no lexer or parser: nothing here reads source text of the language
and builds a syntax tree, and nothing turns a syntax tree into intermediate
code. The syntax tree classes, the intermediate code list and the symbol table
are to be filled in by your own front end; the only command is `spvm`, which
runs intermediate code that is already written.

## Tests

```
pip install .[test]
pytest
```