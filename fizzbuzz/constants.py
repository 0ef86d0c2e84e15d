"""Constants used across fizzbuzz modules."""

# inclusive bounds of the classified range
FIRST_INDEX = 1
LAST_INDEX = 99

FIZZ_DIVISOR = 3
BUZZ_DIVISOR = 5
FIZZ_LABEL = "fizz"
BUZZ_LABEL = "buzz"
FIZZBUZZ_LABEL = FIZZ_LABEL + BUZZ_LABEL

LINE_FORMAT = "{position}: {label}\n"
