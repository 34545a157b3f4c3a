"""Ready-made chains: question answering, summarisation, SQL generation and agents."""