# drills

Short, self-contained solutions to well-known array, string and hashing
exercises. Each one is a plain function that you can import, call and read.
There is no command-line tool; the package is a library of functions.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Easy exercises (`drills.easy`)

| Function | What it returns |
| --- | --- |
| `add(num1, num2)` | The sum of two integers. |
| `is_anagram(s, t)` | Whether the two strings contain the same characters with the same counts. |
| `get_concatenation(nums)` | A new list: the values followed by a second copy of them. |
| `find_words_containing(words, x)` | Indices of the words that contain the character `x`. |
| `contains_duplicate(nums)` | Whether any value appears more than once. |
| `contains_nearby_duplicate(nums, k)` | Whether two equal values sit at most `k` positions apart. A negative `k` places no limit on the distance. |
| `num_identical_pairs(nums)` | How many index pairs `i < j` have `nums[i] == nums[j]`. |
| `num_jewels_in_stones(jewels, stones)` | How many stones are jewels. A jewel character listed twice is counted twice. |
| `remove_duplicates(nums)` | Keeps the first occurrence of each value in the list, in place, and returns how many values remain. |
| `two_sum(nums, target)` | The indices of two values that add up to `target`, later index first, or an empty list if there are none. |
| `is_palindrome(s)` | Whether the lower-cased alphanumeric characters of `s` read the same in both directions. |

```python
from drills.easy import two_sum, is_palindrome, remove_duplicates

two_sum([2, 7, 11, 15], 9)                      # [1, 0]
is_palindrome("A man, a plan, a canal: Panama")  # True

nums = [1, 1, 2, 3, 3]
remove_duplicates(nums)                          # 3
nums                                             # [1, 2, 3]
```

## Medium exercises (`drills.medium`)

| Function | What it returns |
| --- | --- |
| `group_anagrams(strs)` | The words grouped by anagram class, groups in the order their first word appears, words in input order. |
| `longest_consecutive(nums)` | The length of the longest run of consecutive integers (0 for no values). |
| `product_except_self(nums)` | For each position, the product of every other element. |

```python
from drills.medium import group_anagrams, longest_consecutive, product_except_self

group_anagrams(["eat", "tea", "tan", "ate", "nat", "bat"])
# [["eat", "tea", "ate"], ["tan", "nat"], ["bat"]]

longest_consecutive([100, 4, 200, 1, 3, 2])  # 4
product_except_self([1, 2, 3, 4])            # [24, 12, 8, 6]
```