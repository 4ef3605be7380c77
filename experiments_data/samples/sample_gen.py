import os
import random

# ---------------------------
# Configuration Variables
# ---------------------------
FILE_SIZE = 20000  # exact file size in characters
OUTPUT_FOLDER = 'experiments_data/samples'  # folder to place the files
SEED = 42

# File names
FILE1 = 'sample1.txt'
FILE2 = 'sample2.txt'
FILE3 = 'sample3.txt'
FILE4 = 'sample4.txt'

file_names = [FILE1, FILE2, FILE3, FILE4]

ALGORITHM_LINES = [
    "for i in range(n):\n",
    "    if heap[i] < heap[parent(i)]:\n",
    "        swap(heap, i, parent(i))\n",
    "while len(queue) > 1:\n",
    "    left = pop(queue)\n",
    "    right = pop(queue)\n",
    "    push(queue, merge(left, right))\n",
    "return queue[0]\n",
]

ENGLISH_TEXT = (
    "A Huffman code is a particular type of optimal prefix code that is commonly used for "
    "lossless data compression. The output from the algorithm can be viewed as a variable "
    "length code table for encoding a source symbol, such as a character in a file. The "
    "algorithm derives this table from the estimated probability or frequency of occurrence "
    "for each possible value of the source symbol. As in other entropy encoding methods, more "
    "common symbols are generally represented using fewer bits than less common symbols.\n"
)


def full_path(filename):
    return os.path.join(OUTPUT_FOLDER, filename)


def write_sample(filename, text):
    with open(full_path(filename), 'w', encoding='utf-8', newline='') as f:
        f.write(text[:FILE_SIZE])
    print(f"Generated {filename}")


if __name__ == '__main__':
    rng = random.Random(SEED)

    for fname in file_names:
        path = full_path(fname)
        if os.path.exists(path):
            os.remove(path)
            print(f"Deleted existing file: {path}")

    # ---------------------------
    # File 1: Algorithmic text, shuffled lines of pseudo code
    # ---------------------------
    lines = []
    while sum(len(line) for line in lines) < FILE_SIZE:
        lines.append(rng.choice(ALGORITHM_LINES))
    write_sample(FILE1, "".join(lines))

    # ---------------------------
    # File 2: Runs of a few repeated characters with skewed lengths
    # ---------------------------
    runs = []
    while sum(len(run) for run in runs) < FILE_SIZE:
        char = rng.choices("abcde", weights=[50, 25, 12, 8, 5])[0]
        runs.append(char * rng.randint(1, 20))
    write_sample(FILE2, "".join(runs))

    # ---------------------------
    # File 3: English text
    # ---------------------------
    write_sample(FILE3, ENGLISH_TEXT * (FILE_SIZE // len(ENGLISH_TEXT) + 1))

    # ---------------------------
    # File 4: Uniform distribution over 32 characters
    # ---------------------------
    alphabet = "abcdefghijklmnopqrstuvwxyz012345"
    write_sample(FILE4, "".join(rng.choice(alphabet) for _ in range(FILE_SIZE)))

    print("All files generated successfully in folder:", OUTPUT_FOLDER)
