# Convert a Psion Word file to Markdown


import psionwrd

if __name__ == "__main__":
    # Example usage of WordReader to read a .WRD file
    from pathlib import Path
    from psionwrd.reader import WordReader

    wrd_path = Path("samples/SAMPLE.WRD")  # Replace with your .WRD file path
    try:
        with WordReader(wrd_path) as reader:
            print(reader.read_markdown(include_outer_text=True))
    except psionwrd.ProcessError as e:
        print("Error reading document:", e)
