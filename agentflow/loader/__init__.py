"""Document loaders, text splitters and helpers that feed documents into memory."""