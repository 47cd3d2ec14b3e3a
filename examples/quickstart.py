"""
wordcount 快速上手示例。

运行方式：
    python examples/quickstart.py
"""

import io

from wordcount import CountOption, InputDecodingError, count, count_stream, count_text


def main() -> None:
    print("=" * 60)
    print("场景 1：单词频度")
    print("=" * 60)
    print(count(["aa bb cc bb"], CountOption.WORD))

    print("\n" + "=" * 60)
    print("场景 2：字符频度")
    print("=" * 60)
    print(count(["aaccddd"], CountOption.CHAR))

    print("\n" + "=" * 60)
    print("场景 3：行频度")
    print("=" * 60)
    print(count_text("x\nx", CountOption.LINE))

    print("\n" + "=" * 60)
    print("场景 4：非法 UTF-8 输入")
    print("=" * 60)
    try:
        count_stream(io.BytesIO(bytes([0x61, 0xF0, 0x90, 0x80])), CountOption.WORD)
    except InputDecodingError as e:
        print(e)


if __name__ == "__main__":
    main()
