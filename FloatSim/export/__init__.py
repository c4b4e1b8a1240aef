# -- Export Subpackage -- #

'''
Frame data export for float simulation runs.
'''

from FloatSim.export.frameExporter import FrameExporter
