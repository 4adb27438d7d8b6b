from huffcodec.codecs import HuffCodec
from huffcodec.logger import Logger, TreeLog, HeaderLog
from huffcodec.performance_display import PerformanceDisplay
from huffcodec.settings import DEBUG_HIGH

lorem_ipsum_1par = "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Donec a consectetur ligula. Nunc erat dolor, tristique sed sagittis quis, dignissim eget erat. Vivamus enim lorem, finibus sit amet maximus eget, condimentum sit amet massa. Fusce aliquet velit sit amet ex pretium, ut tincidunt dolor semper. Nulla pellentesque eget massa quis rhoncus. Curabitur maximus quis mauris vel sollicitudin. Integer tristique ut nisl sed consequat. Donec a ipsum ut sem cursus ullamcorper. Sed finibus, sapien id volutpat tempus, turpis odio placerat purus, sit amet scelerisque nibh sem a magna. Sed justo sem, facilisis at imperdiet eu, tincidunt vel quam. Ut id sollicitudin eros, sit amet bibendum tortor. Lorem ipsum dolor sit amet, consectetur adipiscing elit."

def main():
    lorem_ipsum_bytes = str.encode(lorem_ipsum_1par)
    print(f"Size of original data: {len(lorem_ipsum_bytes)}")

    codec = HuffCodec(DEBUG_HIGH)
    logger = Logger()
    logger.display_info = False
    compressed_data = codec.compress(lorem_ipsum_bytes, logger=logger)
    print(f"Size of compressed data: {len(compressed_data)}")
    decompressed_data = codec.decompress(compressed_data, logger=logger)
    print(f"Size of decompressed data: {len(decompressed_data)}")

    tree_log = logger.get_logs(TreeLog)[0]
    header_log = logger.get_logs(HeaderLog)[0]
    print(f"Tree: {tree_log.leaves} leaves, depth {tree_log.depth}, header {header_log.bits} bits")

    if lorem_ipsum_bytes == decompressed_data:
        print("Data integrity preserved.")
    else:
        print("Data integrity compromised.")

    pm = PerformanceDisplay(logger.logs)
    pm.plot_coding_log()
    pm.plot_code_lengths()

if __name__ == "__main__":
    main()
