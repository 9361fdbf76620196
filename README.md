# hlskit

Plain-Python reference models of common high-level-synthesis design patterns.
Each function computes what the corresponding hardware kernel computes, with
the same bit widths and C-style integer arithmetic. You can use them as golden
models when you check results from C simulation, co-simulation or a device.

## Installation

```
pip install hlskit
```

There are no runtime dependencies. To run the test suite:

```
pip install "hlskit[test]"
pytest
```

## Modules

### `hlskit.bits`

Integer helpers used throughout the package:

- `wrap_signed(value, bits)` wraps a value to a two's-complement width.
- `wrap_unsigned(value, bits)` wraps a value to an unsigned width.
- `c_div(a, b)` divides and truncates toward zero.
- `c_mod(a, b)` returns a remainder whose sign follows the dividend.

Non-positive widths raise `ValueError`. Division by zero raises
`ZeroDivisionError`.

### `hlskit.stream`

- `Stream` is an unbounded FIFO with `write`, `read`, `empty` and `len()`.
  Reading an empty stream raises `StreamEmptyError`.
- `StreamOfBlocks(block_size, fill=0)` carries whole blocks.
  - The `write_lock()` context manager lends a fresh block and queues it on
    exit.
  - The `read_lock()` context manager lends the oldest block and drops it on
    exit.

### `hlskit.misc`

- `malloc_removed(din, width)` sums the first 31 of 32 inputs. Inputs from
  index `width` onward are shifted right by two first.
- `rtl_model(...)` adds four operand pairs in 10-bit signed arithmetic.
- `rtl_example(...)` returns the 10-bit sum of those four results.

### `hlskit.bypass`

Three dataflow bypassing patterns on 128-value blocks. Each has an original
version and a `*_solution` version. Both versions give the same results.

- `input_bypass(a, b)` and `input_bypass_solution(a, b)` return the
  element-wise sum of `a` and `b`.
- `middle_bypass(a, b)` and `middle_bypass_solution(a, b)` also return the
  element-wise sum of `a` and `b`.
- `output_bypass(a)` and `output_bypass_solution(a)` return two copies of `a`.

### `hlskit.diamond`

A four-stage diamond network (A → B, C → D), built three ways:

- `diamond_fifo(vec_in, size)` works on vectors of 16 unsigned 32-bit words and
  computes `(3x + 25) + 2·3x`. `size` must be a multiple of 16.
- `diamond_pipo(vec_in)` works on 100 unsigned 8-bit values and computes
  `(3x + 25) + 2·(2·3x)`.
- `diamond_blocks(stream_in, stream_out)` computes the same as `diamond_pipo`.
  It passes values between stages as blocks of 10. If the input stream holds
  fewer than 100 values, it raises `StreamEmptyError` without consuming
  anything.

### `hlskit.registers`

`accumulate_char(a, b, c)` returns the new value of `c` after `c += a + b` on
signed 8-bit values. The hand-placed register offsets are in
`REGISTER_OFFSETS`.

### `hlskit.aggregation`

Frozen dataclass records that wrap their fields to the hardware widths:
`CharShort`, `Inner`, `Outer`, `Record`, `CharInt` and `Sextet`.

The kernels over them:

- `sum_char_shorts(arr)`
- `combine_nested(a, b)`
- `sum_records(arr)`
- `drain_and_sum(stream, arr)`
- `copy_char_ints(items)`
- `adjust_sextets(a_in, size)`

Each kernel checks that its arrays have the fixed length the example expects.

### `hlskit.streaming`

AXI4-Stream kernels built on the `AxisPacket` dataclass:

- `axi_stream_to_master(in_stream)` drains packets up to the last one into a
  1024-word memory, in bursts of at most 64 beats.
- `array_of_streams(s_in, s_out)` reads from three input streams and writes to
  three output streams.
- `add_five_packet(a, b)` adds 5 to the data of one packet.
- `add_five_until_last(a, b)` adds 5 to each packet's data, up to the last
  packet.
- `complex_stream(a, b)` works on complex 16-bit data.
- `add_five_array(values)` adds 5 to each of 50 values.

### `hlskit.memory`

Memory-interface kernels:

- `ecc_flags(in1, in2, iterations)`
- `widen_add(a)`
- `init_sin_table()` returns a 256-entry signed 16-bit sine ROM.
- `lookup_math(inval, idx)`
- `axi_master_add(a)`
- `mem_bottleneck(mem)` and `mem_bottleneck_resolved(mem)` compute the same
  10-bit sum of sliding windows of three.

It also has `UramBuffer`, a persistent memory of 16K words of 128 bits.
`UramBuffer.access(wren, rden, addr_w, data_in, addr_r)` reads before it
writes and returns `None` when reading is disabled.

### `hlskit.burst`

`BurstPort` models a memory-mapped port with explicit bursts.

- `read_request` and `write_request` queue bursts.
- `read` and `write` serve the bursts in the order they were requested.
- `write_response` raises if any requested word was never written.

Kernels built on it:

- `burst_with_conditionals(a, b, factor)` works on arrays of 800 values. It
  writes only the first and last quarters of the result.
- `krnl_transfer(data, size)` and `transfer_kernel(data, size)` each return
  the first `size` values repeated 10 times.

## Example

```python
from hlskit.misc import rtl_example
from hlskit.stream import Stream
from hlskit.diamond import diamond_blocks

print(rtl_example(1, -9, 11, -19, 1, 2, 3, 4))  # -6

source, sink = Stream(), Stream()
for value in range(100):
    source.write(value)
diamond_blocks(source, sink)
print(sink.read())  # 25
```

## What it does not do

hlskit is a library of functions only:

- It has no command-line tool.
- It does not run synthesis.
- It does not talk to an FPGA device or load bitstreams.
- It does not read or write result files.

To compare against hardware, run the hardware yourself and check its output
against these functions.