# railwind

railwind reads the class names used in an HTML page (or in a plain text
file) and writes a stylesheet with a CSS rule for each utility class it
recognises, such as `flex`, `hidden`, `italic`, `container`,
`px-[20px]`, `-mx-[4px]`, `top-[3px]`, `w-[50%]`, `text-[#64748b]`,
`rotate-[45deg]`, `space-x-[25%]`, `stroke-2`, `transition` or
`animate-spin`.

## Which classes are understood

- layout: `container`, display keywords (`block`, `flex`, `grid`,
  `hidden`, ...), `static`/`fixed`/`absolute`/`relative`/`sticky`,
  `float-*`, `clear-*`, `overflow-*`, `overscroll-*`, `object-*`,
  `aspect-*`, `columns-*`, `break-after-*`, `break-before-*`,
  `break-inside-*`, `box-border`/`box-content`, `box-decoration-*`,
  `isolate`, `visible`/`invisible`/`collapse`, `inset-*`, `top-*`,
  `right-*`, `bottom-*`, `left-*`, `z-*` (negative forms with a leading `-`)
- spacing: `p`, `pt`, `pr`, `pb`, `pl`, `px`, `py`, the matching margin
  classes (also negative), `space-x-*` and `space-y-*` (including
  `*-reverse`)
- sizing: `w-*`, `h-*`, `min-w-*`, `min-h-*`, `max-w-*`, `max-h-*`
- SVG: `fill-*`, `stroke-*`, `stroke-0`, `stroke-1`, `stroke-2`
- tables: `border-collapse`, `border-separate`, `border-spacing-*`,
  `table-auto`, `table-fixed`
- transforms: `translate-x-*`, `translate-y-*`, `rotate-*`, `skew-x-*`,
  `skew-y-*`, `scale-*`, `scale-x-*`, `scale-y-*`, `origin-*`
- transitions and animation: `transition`, `transition-none`,
  `transition-all`, `transition-colors`, `transition-opacity`,
  `transition-shadow`, `transition-transform`, `duration-*`, `ease-*`,
  `delay-*`, `animate-none`, `animate-spin`, `animate-ping`,
  `animate-pulse`, `animate-bounce`
- typography: `font-*`, `text-*` (alignment, overflow, size, colour),
  `tracking-*`, `leading-*`, `list-*`, `decoration-*`, `underline`,
  `underline-offset-*`, `overline`, `line-through`, `no-underline`,
  `indent-*`, `align-*`, `whitespace-*`, `break-*`, `content-*`,
  `antialiased`, `italic`, `uppercase`, `truncate`, `tabular-nums` and
  the other keyword classes of these kinds

Classes that take a value (everything written `-*` above that is not a
fixed keyword) take it in square brackets: `_` inside the brackets stands
for a space and `'` for `"`, and a value starting with `.` gets a leading
`0`. Hex colours in `text-[#...]` are written as `rgb(...)`.

Class names may carry modifiers, separated by colons:

- screen and preference queries: `sm`, `md`, `lg`, `xl`, `2xl`, `dark`,
  `motion-reduce`, `motion-safe`, `contrast-more`, `contrast-less`,
  `portrait`, `landscape` — the rule is wrapped in an `@media` block
- pseudo-classes such as `hover`, `focus`, `first`, `odd`, `disabled`
- pseudo-elements such as `before`, `after`, `placeholder`, `file`
- parent and sibling states: `group-hover`, `peer-checked` and the like

For example `hover:lg:flex` produces:

```
@media (min-width: 1024px) {
    .hover\:lg\:flex:hover {
        display: flex;
    }
}
```

A class name that no family recognises is reported as a warning with its
line and column in the input. A class that is recognised but whose value
cannot be resolved produces no rule and no warning.

## What it does not do

- No named theme scale is bundled: values such as `px-5`, `w-1/2`,
  `text-red-500` or `z-10` are not resolved; use bracketed values instead.
- Flexbox and grid, backgrounds, borders, effects, filters, interactivity
  and accessibility classes (`justify-start`, `bg-*`, `rounded`, `shadow`,
  `blur`, `cursor-*`, `sr-only`, ...) are not recognised.
- No base (reset) stylesheet is written ahead of the generated rules.

## Installation

```
pip install .
```

## Command line

```
railwind index.html
railwind index.html --output site.css
railwind classes.txt -o site.css
```

A file ending in `.html` is scanned for `class="..."` and
`className="..."` attributes (the bare markers `group` and `peer` are
skipped); any other file with an extension is treated as a list of class
names separated by spaces or newlines. A file with no extension is not
read. The output file defaults to `railwind.css`. Warnings are printed to
standard output, one per line:

```
Warning on Line: 3, Col: 14; Could not match class 'px-foo'
```

## Library

The functions in `railwind.compiler` do the same work from Python:

- `collect_classes_from_html(html)` and `collect_classes_from_str(text)`
  return a dict of class names to `Position`s, in order of appearance;
- `parse_raw_classes(raw_classes)` returns a list of `ParsedClass` objects
  and a list of warnings; `ParsedClass.to_css()` renders one rule, or
  `None`;
- `parse_string(text)` and `parse_html_to_string(path)` return the CSS and
  the warnings; `parse_html_to_file(input_path, output_path)` writes the
  CSS and returns the warnings.

`railwind.classes.parse_class(name)` recognises a single class without
modifiers, and `railwind.modifiers.parse_state(name)` a single modifier.
Warnings are `railwind.warning.Warning` objects; `str()` gives the message
shown above.

## Running the tests

```
pip install ".[test]"
pytest
```